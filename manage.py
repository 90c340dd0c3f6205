#!/usr/bin/env python
"""Command-line entry point for the hospital directory project."""
import os
import sys


def main() -> None:
    """Run administrative tasks for the hospital directory."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'hospital_directory.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Is it installed and available on your "
            "PYTHONPATH? Did you forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
