"""
AddrLens - Address Lookup and Classification Tool

Entry point for running as a module:
    python -m addrlens <target>
"""

from .cli import main

if __name__ == '__main__':
    main()
