"""Entry point for running the Category API from a checkout.

Intended for hosts where only a single Python file can be specified
(Pterodactyl, a bare Docker ``CMD``).  Configuration comes from
environment variables; see ``category_api/app/core/config.py``.

Usage:
    python run.py
"""

from category_api.server import main


if __name__ == "__main__":
    main()
