"""
Use Cases

Organized into domain folders:
- access/: RFID access recording and log browsing
- notifications/: Notification inbox and dispatch
- admin/: Identity, dorm and room administration

Import from subdirectories for better organization.
"""
