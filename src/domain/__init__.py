"""Domain layer - console vocabulary.

Structure:
- enums/: Auth outcomes, error kinds, navigation states
- value_objects/: Credential, AuthOutcome
- errors/: Classified remote call errors
- protocols/: Ports for the Midas API, health probe and logging

The domain layer has NO dependencies on the web framework.
"""
