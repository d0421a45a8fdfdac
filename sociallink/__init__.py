"""Social graph, messaging and call signaling service."""
