"""Built-in plugins shipped with shipdisc."""
