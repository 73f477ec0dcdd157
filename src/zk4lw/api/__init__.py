"""HTTP front end for four-letter-word commands."""
