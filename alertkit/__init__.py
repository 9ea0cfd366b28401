"""Modal alert queueing over a tree of presentation surfaces."""
