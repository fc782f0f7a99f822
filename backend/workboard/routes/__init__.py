"""
Workboard Backend: API Routes Package
=======================================

Route Inventory:
    - index.py:      GET  /                    (welcome text)
    - employees.py:  GET  /employees           (list)
                     POST /employees           (create)
                     PUT  /employees/{id}      (overwrite)
                     DELETE /employees/{id}    (remove)
    - tasks.py:      GET  /tasks               (list)
                     GET  /tasks/{id}          (single task)
                     POST /tasks               (create)
                     PUT  /tasks/{id}          (overwrite, returns stored row)
                     DELETE /tasks/{id}        (remove, returns changes)
    - health.py:     GET  /health              (storage check)

Routes are thin: they pull a repository from workboard.dependencies, call one
operation and pick the status code. Errors travel as exceptions to the
handlers registered in main.py.
"""
