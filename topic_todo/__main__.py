"""Entrypoint for `python -m topic_todo`."""

from topic_todo.cli import main


if __name__ == "__main__":
    main()
