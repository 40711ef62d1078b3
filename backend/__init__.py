"""DevConnector HTTP backend."""
