"""Application layer: query objects, handlers and the query bus."""
