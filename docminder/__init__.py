"""docminder: extract reminder dates from scanned bills, invoices and warranty cards."""

__version__ = "0.1.0"
