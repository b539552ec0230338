"""
Fitracker progress hub.

Server side: FastAPI router and Motor-backed service for progress records.
Client side: httpx API client and the view model that derives calendar,
chart, and PDF export views from the record list.
"""
