"""Language helpers: equality, zero values, casting, errors, panics and list utilities."""