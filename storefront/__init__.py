# Storefront checkout and order history service
