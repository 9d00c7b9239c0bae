"""
Service layer.

The catalog store, the query option parser, the edit-distance matcher
and the suggestion resolver live here.  None of them know about HTTP;
the routes in ``api/v1/endpoints`` call into them.
"""
