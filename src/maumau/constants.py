# src/maumau/constants.py

RANKS = tuple(range(1, 14))

ACE = 1        # skips the next player (ace_rule="skip")
DRAW_TWO = 7   # next player draws two and loses the turn
JACK = 11      # wild; the player names the suit to follow
QUEEN = 12     # reverses direction

CARDS_PER_SHOE = len(RANKS) * 4

ACE_RULES = ("skip", "none")
QUEEN_TWO_PLAYER_RULES = ("skip", "noop")
