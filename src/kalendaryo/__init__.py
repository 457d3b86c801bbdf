"""kalendaryo — school event calendar organizer."""

__version__ = "0.1.0"
