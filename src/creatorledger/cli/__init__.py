"""Command line interface for creatorledger."""
