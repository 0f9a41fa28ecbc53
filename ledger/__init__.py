"""In-memory ledger of bank accounts."""
