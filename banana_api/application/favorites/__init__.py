"""Use cases for the favorites bounded context."""
