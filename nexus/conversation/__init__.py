"""Conversation domain: sessions, state machine and the turn engine."""
