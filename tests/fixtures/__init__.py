"""
Test Fixtures - Sample Catalogs.

    - sample_messages.yaml: Small catalog with deliberately incomplete
      language coverage, for fallback tests
"""
