"""Package reserved for HTTP routes; it holds no modules yet."""