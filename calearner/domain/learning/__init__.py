"""Learning domain: tracks, daily lessons, streaks and the lesson archive."""
