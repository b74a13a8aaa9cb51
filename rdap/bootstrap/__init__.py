"""RDAP bootstrap: registry files, caches and lookups of responsible servers."""