"""Desktop front end for Endless Runner."""
