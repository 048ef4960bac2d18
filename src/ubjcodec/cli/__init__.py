"""Command line interface for ubjcodec."""
