#!/usr/bin/env python3
"""Entry point wrapper for the icon resolver command line."""

from iconresolver import main


if __name__ == "__main__":  # pragma: no cover
    main()
