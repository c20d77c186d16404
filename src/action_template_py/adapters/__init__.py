"""Host adapters implementing the application ports."""
