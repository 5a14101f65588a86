"""Entry point for 'python -m passguard' command."""

from passguard.cli import main

if __name__ == "__main__":
    main()
