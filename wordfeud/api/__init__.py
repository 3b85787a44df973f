"""Wire-level types exchanged with the Wordfeud service."""
