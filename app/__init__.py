"""HTTP API, page retrieval and CLI for the JavaScript compatibility analyzer."""
