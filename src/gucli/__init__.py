"""gucli - run curated shell commands with a hard timeout and a bounded audit log."""
