"""
Splitwise API Access.

Requests are built as plain values (requests.py), sent once through the
async client (client.py) and interpreted per endpoint (responses.py).
"""
