"""
Service layer.

Services hold the request handling logic for each resource and delegate data
access to repositories. Outcomes are returned as OperationResult values.
"""
