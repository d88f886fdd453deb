"""statechess — reduced-set chess rules with a turn-phase state machine."""

__version__ = "0.1.0"
