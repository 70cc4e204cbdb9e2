"""
Redline - Card-Driven Racing Engine

A deterministic rules engine for a turn-based racing card game.
Cars race around a lap-based circuit, players spend cards from their
hand to generate speed, and gear shifts are paid for with engine fuel.
The engine provides:
- Card economy (deck, hand, discard pile)
- Car gear/speed/heat state machine
- Track topology and turn-order scheduling
- Round/turn loop and an HTTP API
"""

__version__ = "0.1.0"
