"""Energy balance domain: profiles, ledgers and daily aggregates."""
