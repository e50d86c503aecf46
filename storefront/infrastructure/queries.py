"""GraphQL documents sent to the Shopify Storefront API."""

PRODUCTS_QUERY = """
  query Products($first: Int!) {
    products(first: $first) {
      edges {
        node {
          title
          handle
          description
          priceRange {
            minVariantPrice { amount }
          }
          images(first: 1) {
            edges {
              node { transformedSrc altText }
            }
          }
        }
      }
    }
  }
"""

PRODUCT_BY_HANDLE_QUERY = """
  query ProductByHandle($handle: String!) {
    productByHandle(handle: $handle) {
      id
      handle
      title
      descriptionHtml
      priceRange {
        minVariantPrice { amount currencyCode }
      }
      images(first: 1) {
        edges {
          node { transformedSrc altText }
        }
      }
      variants(first: 1) {
        edges {
          node {
            id
            title
            price { amount currencyCode }
          }
        }
      }
    }
  }
"""

CART_CREATE_MUTATION = """
  mutation cartCreate($input: CartInput!) {
    cartCreate(input: $input) {
      cart {
        id
        checkoutUrl
      }
      userErrors {
        field
        message
      }
    }
  }
"""
