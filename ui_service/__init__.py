"""Terminal view for Diamonds: state, key handling and rendering."""
