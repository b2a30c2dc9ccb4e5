"""Translation workbook (.xlsx) reading and writing."""
