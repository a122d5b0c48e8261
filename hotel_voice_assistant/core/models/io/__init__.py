"""
I/O models for API requests and responses.

These Pydantic schemas define the contract between the API and its clients
(the guest web app, the staff dashboard and the Vapi webhook).
"""
