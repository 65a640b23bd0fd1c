"""
main.py

Convert an ING bank transaction CSV export into a QIF file that budgeting
software such as YNAB can import.

Usage:
    pip install -e .
    python main.py NL09INGB1234567890_03-10-2016_03-11-2016.csv

Dragging a CSV file onto the installed ``csv2qif`` executable does the same.
Run ``python main.py --help`` for the options that shape the memo line.
"""

from csv2qif.cli import main


if __name__ == '__main__':
    main()
