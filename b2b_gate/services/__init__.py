"""Services Layer: wires collaborators into the evaluator and logs decisions."""
