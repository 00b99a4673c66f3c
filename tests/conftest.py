"""Shared fixtures for qrsecure tests."""

import pytest


@pytest.fixture
def contact_input():
    """Raw contactForm input that passes validation."""
    return {
        "password": "secret1",
        "name": "Jane Doe",
        "email": "jane@x.com",
        "phone": "+19876543210",
        "subject": "Hi",
        "message": "1234567890",
    }


@pytest.fixture
def job_input():
    """Raw jobApplication input without the resume checkbox."""
    return {
        "password": "hunter22",
        "fullName": "John Smith",
        "email": "john@example.com",
        "phone": "9876543210",
        "position": "Engineer",
        "experience": "5",
        "skills": "Python, SQL",
    }
