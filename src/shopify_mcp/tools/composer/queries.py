"""GraphQL documents sent to the Shopify Admin API, one per upstream request shape."""

ORDERS_QUERY = """
query getOrders($first: Int!, $query: String) {
  orders(first: $first, query: $query) {
    edges {
      node {
        id
        name
        createdAt
        totalPriceSet {
          shopMoney {
            amount
            currencyCode
          }
        }
        financialStatus
        fulfillmentStatus
        lineItems(first: 10) {
          edges {
            node {
              title
              quantity
              originalUnitPriceSet {
                shopMoney {
                  amount
                  currencyCode
                }
              }
            }
          }
        }
        customer {
          email
          displayName
        }
      }
    }
  }
}
""".strip()

FINANCIAL_SUMMARY_QUERY = """
query getFinancialSummary($first: Int!, $query: String) {
  orders(first: $first, query: $query) {
    edges {
      node {
        id
        createdAt
        totalPriceSet {
          shopMoney {
            amount
            currencyCode
          }
        }
        financialStatus
      }
    }
  }
}
""".strip()

TRANSACTIONS_QUERY = """
query getTransactions($id: ID!) {
  order(id: $id) {
    id
    name
    transactions {
      id
      kind
      status
      amount
      gateway
      createdAt
    }
  }
}
""".strip()

INVENTORY_LEVELS_QUERY = """
query getInventoryLevels($first: Int!, $locationId: ID) {
  inventoryItems(first: $first) {
    edges {
      node {
        id
        sku
        tracked
        inventoryLevels(first: 10, locationId: $locationId) {
          edges {
            node {
              available
              location {
                id
                name
              }
            }
          }
        }
        variant {
          displayName
          price
        }
      }
    }
  }
}
""".strip()

PRODUCTS_QUERY = """
query getProducts($first: Int!, $query: String) {
  products(first: $first, query: $query) {
    edges {
      node {
        id
        title
        status
        totalInventory
        variants(first: 10) {
          edges {
            node {
              id
              title
              price
              sku
              inventoryQuantity
            }
          }
        }
      }
    }
  }
}
""".strip()

INVENTORY_SET_QUANTITIES_MUTATION = """
mutation inventorySetQuantities($input: InventorySetQuantitiesInput!) {
  inventorySetQuantities(input: $input) {
    inventoryAdjustmentGroup {
      reason
      changes {
        name
        delta
      }
    }
    userErrors {
      field
      message
    }
  }
}
""".strip()

STORE_PRODUCTS_QUERY = """
query getStoreProducts($first: Int!) {
  products(first: $first) {
    edges {
      node {
        id
      }
    }
  }
}
""".strip()

LATEST_ORDER_QUERY = """
query getLatestOrder {
  orders(first: 1, reverse: true) {
    edges {
      node {
        id
      }
    }
  }
}
""".strip()

RECENT_ORDERS_QUERY = """
query getRecentOrders($first: Int!) {
  orders(first: $first, reverse: true) {
    edges {
      node {
        totalPriceSet {
          shopMoney {
            amount
            currencyCode
          }
        }
        financialStatus
      }
    }
  }
}
""".strip()

SALES_SUMMARY_QUERY = """
query getSalesSummary($first: Int!, $query: String) {
  orders(first: $first, query: $query) {
    edges {
      node {
        id
        createdAt
        totalPriceSet {
          shopMoney {
            amount
            currencyCode
          }
        }
        lineItems(first: 50) {
          edges {
            node {
              title
              quantity
              originalUnitPriceSet {
                shopMoney {
                  amount
                }
              }
              product {
                id
                title
              }
            }
          }
        }
        customer {
          id
          email
        }
      }
    }
  }
}
""".strip()

PRODUCT_QUERY = """
query getProduct($id: ID!) {
  product(id: $id) {
    id
    title
    totalInventory
    variants(first: 10) {
      edges {
        node {
          id
          title
          price
          inventoryQuantity
        }
      }
    }
  }
}
""".strip()

PRODUCT_ORDERS_QUERY = """
query getOrdersForProduct($first: Int!) {
  orders(first: $first, reverse: true) {
    edges {
      node {
        createdAt
        lineItems(first: 50) {
          edges {
            node {
              product {
                id
              }
              quantity
              originalUnitPriceSet {
                shopMoney {
                  amount
                }
              }
            }
          }
        }
      }
    }
  }
}
""".strip()
