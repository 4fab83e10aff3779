"""Text primitives: normalisation, entities, incident context, similarity."""
