"""Services Layer: the mutation pipeline steps and the action entry points.

Invariants:
    - Services talk to the store only through core/repository_protocols.py
    - Action entry points (category_actions, product_actions) never raise;
      every exit is an ActionResult

Design Decisions:
    - One file per pipeline step for locality (guard, executor, fan-out, boundary)
"""
