# Services module
#
# Data access: one function per (entity, operation), each taking the Store
# first. Collaborators (nexus, evolution, content, referral, estimator) are
# in-process mocks.
