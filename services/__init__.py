"""Business logic for the expense API."""
