"""Allow ``python -m category_api`` to start the server."""

from category_api.server import main

if __name__ == "__main__":
    main()
