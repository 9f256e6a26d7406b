"""liftlog: workout tracking backend."""
