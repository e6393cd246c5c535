"""REST API for the planguard delete guard."""
