"""
Service layer.

``EmployeeService`` holds the business rules; ``EmployeeStore`` holds
the records.  Handlers depend on the service only.
"""
