"""Hotel Voice Assistant.

Backend service for a hotel voice concierge. Guests talk to a Vapi.ai voice
assistant from the in-room web client; this package persists what comes out of
those calls and exposes it to hotel staff.

High-level architecture
-----------------------

- ``hotel_voice_assistant.core``:

  - Logging and Logfire monitoring setup.
  - The SQLModel database layer (entities, repositories, sessions).
  - Pydantic I/O models shared by the API and the services.

- ``hotel_voice_assistant.server``:

  - The FastAPI application and its ``/api`` routers.
  - Services for order intake, the realtime staff channel, the Vapi REST API
    and outbound summary e-mails.

Typical workflow
----------------

1. The guest finishes a call; Vapi posts transcripts and an end-of-call report
   to the webhook (or the client posts them directly).
2. The guest confirms an order; an ``Order`` and a matching ``StaffRequest``
   are stored and staff dashboards receive a ``data_changed`` event.
3. Staff move the request through its statuses and exchange messages; each
   change is pushed to connected dashboards and to the guest's order room.
"""

__version__ = "0.1.0"
