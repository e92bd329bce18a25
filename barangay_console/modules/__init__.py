"""Feature modules of the barangay health-center console."""
