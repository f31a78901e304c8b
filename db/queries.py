TENANT_FIELDS = """
        id
        name
        slug
        domain
        menu {
          url
          filename
        }
        logo {
          url
        }
        address
        phone
        email
        heroTitle
        heroSubtitle
        heroDescription
        heroImage {
          url
          filename
        }
        shortAboutTitle
        shortAboutText
        newMenu {
          src {
            url
            filename
          }
          id
        }
"""

GET_TENANTS = """
  query getTenants($limit: Int = 100) {
    Tenants(limit: $limit) {
      docs {%s}
      totalDocs
      limit
    }
  }
""" % TENANT_FIELDS

GET_TENANT = """
  query getTenant($slug: String) {
    Tenants(where: { slug: { equals: $slug } }) {
      docs {%s}
    }
  }
""" % TENANT_FIELDS

GET_HOME_INFORMATION = """
  query getHomeInformation {
    HomeInformation {
      CatchPhrase1
      CatchPhrase2
      quote_s_ {
        quote
        id
      }
    }
  }
"""

GET_GALLERY = """
  query getGallery {
    Galleries(limit: 100) {
      docs {
        id
        image {
          url
          filename
          alt
        }
        caption
        branch {
          id
          name
          slug
        }
      }
      totalDocs
    }
  }
"""

GET_CUSTOMER = """
  query getCustomer($customerPhone: String) {
    Customers(where: { customerPhone: { equals: $customerPhone } }) {
      docs {
        id
        customerName
        customerPhone
      }
    }
  }
"""

CREATE_CUSTOMER = """
  mutation CreateCustomer($customerName: String!, $customerPhone: String!) {
    createCustomer(
      data: { customerName: $customerName, customerPhone: $customerPhone }
    ) {
      id
      customerName
      customerPhone
    }
  }
"""

CREATE_RESERVATION = """
  mutation CreateReservation(
    $customer: String!
    $reservationDateTime: String!
    $numberOfGuests: Float!
    $specialRequests: String
    $branch: String!
    $status: Reservation_status_MutationInput!
  ) {
    createReservation(
      data: {
        customer: $customer
        reservationDateTime: $reservationDateTime
        numberOfGuests: $numberOfGuests
        specialRequests: $specialRequests
        branch: $branch
        status: $status
      }
    ) {
      id
      reservationDateTime
      numberOfGuests
    }
  }
"""

CREATE_CONTACT_MESSAGE = """
  mutation CreateContactMessage(
    $customer: String!
    $message: String
    $branch: String!
    $status: ContactMessage_status_MutationInput!
  ) {
    createContactMessage(
      data: {
        customer: $customer
        message: $message
        branch: $branch
        status: $status
      }
    ) {
      id
      customer {
        id
        customerName
        customerPhone
      }
      message
      branch {
        id
        name
      }
      status
    }
  }
"""

PING = "{ __typename }"
