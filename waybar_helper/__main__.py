"""Entry point for `python -m waybar_helper`."""

from .cli import main

if __name__ == "__main__":
    main()
