"""MentorMatch: mentorship matching and session booking API."""
