"""bloglist - a small REST API for blog entries, their authors and summary statistics.

Usage:
    bloglist server            # Run the API on http://127.0.0.1:8000
    bloglist stats             # Print the summary from a running server
"""
