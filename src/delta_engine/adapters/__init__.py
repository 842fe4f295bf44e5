"""Host adapters for the history engine."""
