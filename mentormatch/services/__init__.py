# mentormatch/services/__init__.py
# Business logic: availability matching, booking checks, lifecycle and ratings.
