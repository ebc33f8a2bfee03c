"""REST service exposing the Villain collection."""
