"""Patrimony tracker: accounts, balance snapshots and derived views."""
