"""Service layer: tokens, accounts, the donation ledger and mail."""
