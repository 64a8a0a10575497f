from ariadne import gql

type_defs = gql("""
    type User {
        id: ID!
        firstName: String
        email: String!
        role: String!
        createdAt: String
        updatedAt: String
    }

    type Submitter {
        firstName: String
        role: String!
    }

    type Donation {
        id: ID!
        donorName: String!
        item: String!
        value: Float
        message: String
        date: String
        submittedBy: Submitter
    }

    type AuthPayload {
        token: String!
        user: User!
    }

    type Query {
        getDonations: [Donation!]!
        getMe: User
    }

    type Mutation {
        register(firstName: String!, email: String!, password: String!, role: String): AuthPayload!
        login(email: String!, password: String!): AuthPayload!
        addDonation(donorName: String!, item: String!, message: String, value: Float): Donation!
    }
""")
