"""Snake Duel: a player snake against an AI snake on a wrap-around grid."""
