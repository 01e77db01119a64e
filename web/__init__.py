"""HTTP layer: settings, logging, aiohttp application and handlers."""
