"""Package reserved for repository and library managers; it holds no modules yet."""