"""
Command-line interface for ProtStudio.

Usage patterns:
    protstudio analyze MKTAYIAKQR
    protstudio dataset proteins.fasta -o reports.json
    protstudio residue W
"""

from .main import cli, main

__all__ = ["cli", "main"]
