"""Formula functions grouped by category, with a registry that combines them."""