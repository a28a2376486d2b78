"""caconfig: declarative settings for a certificate authority service.

caconfig reads the settings of a certification authority from its key/value
registry, compares them to a desired state, and converges them with the
smallest set of writes. The engine is table-driven: a schema says how each
setting is stored (plain scalar, delimited string list, or bit-flag set) and
every phase dispatches on that kind.

Core workflows:
- Get: Read and decode the full current configuration
- Test: Check whether a (partial) desired state is already met
- Set: Write only the differing settings, then advise a service restart
"""
