"""Receipt points core: model, scoring engine and ledger."""
