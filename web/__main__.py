"""Allow ``python -m web`` to start the API."""
import asyncio

from web.main import main


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
