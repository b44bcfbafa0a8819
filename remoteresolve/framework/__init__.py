"""Resolver interfaces, a fake resolver and per-resolver configuration handling."""