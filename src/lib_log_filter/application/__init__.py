"""Application layer: emitter port and the filter composition use case."""
