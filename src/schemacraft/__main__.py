"""Entry point for 'python -m schemacraft' command."""

from schemacraft.cli import main

if __name__ == "__main__":
    main()
