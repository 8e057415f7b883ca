"""
Output renderers for Structured Report.

This package contains one module per output format:
- delimited: CSV text
- spreadsheet: Excel 2003 XML Spreadsheet markup
- text_table: fixed-width text table
"""
