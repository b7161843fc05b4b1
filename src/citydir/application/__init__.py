"""Application – listing pipeline and the client-side services around it."""
