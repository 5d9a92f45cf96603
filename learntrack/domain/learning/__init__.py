"""
Learning domain module.

Learning items, their modules and the prerequisite edges between them,
with the status state machines and progress derivation.
"""
