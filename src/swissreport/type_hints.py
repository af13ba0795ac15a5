"""Type hints used in Swiss Report."""

from typing import Callable, List, Tuple

# Index of a player in Tournament.players
PlayerIndex = int
# Zero-based round number
RoundIndex = int

# One row of checklist cells
Row = List[str]
# Column widths for a checklist, one per cell of a row
ColumnWidths = List[int]

# Colours of two players in the round where they last differed
ColourPair = Tuple["Colour", "Colour"]
# (higher ranked, lower ranked) player in a pairing
RankedPair = Tuple["Player", "Player"]

# Standings comparator: True when the first player ranks below the second
RankCompare = Callable[["Player", "Player"], bool]
# Produces the system specific columns for one player
SpecialtyValues = Callable[["Player"], List[str]]

#  LocalWords:  RankCompare ColourPair
