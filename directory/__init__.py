"""Hospital directory application.

Contains the models, services, API views, pages and template
components of the directory site.
"""
