"""Kitty remote-control client, command builders and a bounded line buffer."""