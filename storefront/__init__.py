# Walkie Talkie Rentals storefront service
