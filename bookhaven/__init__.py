"""BookHaven: catalog, events and newsletter API for an independent bookstore."""
