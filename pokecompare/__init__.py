"""Backend for browsing and comparing Pokemon on top of PokeAPI."""
