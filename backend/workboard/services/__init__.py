"""
Workboard Backend: Services Layer
===================================

Service Inventory:
    - ResourceRepository: generic table gateway (one SQL statement per call),
      built twice by build_employee_repository / build_task_repository
    - seed_employees: inserts the sample employee records at startup

Services know nothing about HTTP. Routes translate their results and
exceptions into responses.
"""
