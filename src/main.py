"""Main entry point for tazu."""
from cli import cli


def main():
    cli(prog_name="tazu")

if __name__ == "__main__":
    main()
