# Allows `python .` from the repository root

from n2h.cli import main


if __name__ == "__main__":
    main()
