#!/usr/bin/env python3

import os
import sys


def main():
    """Run a Django management command for Revision List."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'revlist.settings')

    from django.core.management import execute_from_command_line

    from revlist import initialize

    if len(sys.argv) > 1 and sys.argv[1] not in ('migrate', 'makemigrations'):
        initialize()

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
