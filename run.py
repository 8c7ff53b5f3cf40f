#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
TrackHabit launcher (MVC layout)
"""

import sys


def main():
    """Run the application."""
    try:
        from trackhabit.main import main as app_main
    except ImportError as e:
        print(f"❌ Module import error: {e}")
        print("Install the required packages:")
        print("pip install -e .")
        sys.exit(1)
    app_main()


if __name__ == "__main__":
    main()
